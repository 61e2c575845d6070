import reprlib
from pprint import pformat


def payload_repr(value: object, width: int = 80, depth: int = 3) -> str:
    try:
        if isinstance(value, str):
            text = repr(value)
        else:
            text = pformat(value, width=width, depth=depth, compact=True)
            if "\n" in text:
                text = reprlib.repr(value)
    except Exception:  # noqa: BLE001
        text = f"<{type(value).__name__} object>"
    if len(text) <= width:
        return text
    suffix = "..."[: max(width, 0)]
    return text[: max(width - len(suffix), 0)] + suffix
