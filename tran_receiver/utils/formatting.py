"""
Helper functions for formatting data into human-readable strings.
"""


def format_size(bytes_size: int) -> str:
    """
    Formats bytes into a human-readable SI size string (e.g., '2.0 kB', '145.3 MB').

    Counts below 1000 are printed as whole bytes.
    """
    if bytes_size < 1000:
        return f"{max(bytes_size, 0)} B"
    units = "kMGTPE"
    size = float(bytes_size)
    i = -1
    while size >= 1000 and i < len(units) - 1:
        size /= 1000
        i += 1
    return f"{size:.1f} {units[i]}B"
