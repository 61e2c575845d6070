from dataclasses import dataclass

from ._format import payload_repr


@dataclass(slots=True)
class Config:
    """Process-wide settings for pyoresult.

    Args:
        max_payload_width (int): Maximum width of a payload repr embedded in an error message.
        max_payload_depth (int): Nesting level past which containers in a payload repr are elided.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> pr.get_config().payload_repr("x" * 100)[-5:]
    'xx...'

    ```
    """

    max_payload_width: int = 80
    max_payload_depth: int = 3

    def payload_repr(self, value: object) -> str:
        return payload_repr(value, self.max_payload_width, self.max_payload_depth)


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance.

    Mutate its attributes to change the behaviour globally.
    """
    return _CONFIG
