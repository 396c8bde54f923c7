__all__ = ["Time"]


from datetime import timedelta


class Time:
    @staticmethod
    def minutes(value: int) -> timedelta:
        return timedelta(minutes=value)

    @staticmethod
    def format(value: timedelta) -> str:
        """Format a duration as a backend time unit string.

        Uses the largest of ``m``, ``s`` or ``ms`` that represents
        the duration exactly.
        """
        total_ms = int(value.total_seconds() * 1000)
        if total_ms % 60_000 == 0:
            return f"{total_ms // 60_000}m"
        if total_ms % 1000 == 0:
            return f"{total_ms // 1000}s"
        return f"{total_ms}ms"
