"""Range of UIDs handed out to regular (human) accounts."""

from dataclasses import dataclass

# Defaults used by `useradd` on most distributions
DEFAULT_UID_MIN = 1000
DEFAULT_UID_MAX = 60000

# uid_t is an unsigned 32-bit integer
MAX_UID = 2**32 - 1


@dataclass(frozen=True)
class UidRange:
    """Inclusive ``[min, max]`` bounds for regular user IDs."""

    min: int = DEFAULT_UID_MIN
    max: int = DEFAULT_UID_MAX

    def __post_init__(self) -> None:
        """Reject bounds outside uid_t or in the wrong order."""
        for bound in (self.min, self.max):
            if not 0 <= bound <= MAX_UID:
                msg = f"UID bounds must be within 0..{MAX_UID}, got {bound}"
                raise ValueError(msg)
        if self.min > self.max:
            msg = f"UID_MIN {self.min} is greater than UID_MAX {self.max}"
            raise ValueError(msg)

    def __contains__(self, uid: object) -> bool:
        return isinstance(uid, int) and self.min <= uid <= self.max
