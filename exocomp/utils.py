def format_duration(seconds: float) -> str:
    """Format elapsed seconds as ``1h 2m 3s``, ``2m 3s`` or ``3s``."""
    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
