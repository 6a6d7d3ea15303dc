"""
Helper utility functions for Maze Trail
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def format_time(seconds):
    """Format seconds to MM:SS string (minutes wrap every hour)"""
    seconds = max(0, seconds)
    minutes = int(seconds // 60) % 60
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"

