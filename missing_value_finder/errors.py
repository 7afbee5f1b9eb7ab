class InputFormatError(RuntimeError):
    def __init__(self, msg: str) -> None:
        super().__init__(f"Bad input: {msg}")


class ScanError(RuntimeError):
    pass
