def _two_digits(n: int) -> str:
    return ("0" if n < 10 else "") + str(n)


def ms_to_time(ms: float) -> str:
    """Format a duration as hh:mm:ss.d (3661234 -> "01:01:01.2")."""
    total = int(ms)
    millis = total % 1000
    secs = (total // 1000) % 60
    mins = (total // 60000) % 60
    hours = total // 3600000
    return (
        f"{_two_digits(hours)}:{_two_digits(mins)}:{_two_digits(secs)}"
        f".{millis // 100}"
    )
