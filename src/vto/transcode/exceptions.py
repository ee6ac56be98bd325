"""Custom exceptions for transcode option building.

Option building is total over well-formed input: unparseable bitrates and
unknown presets degrade rather than raise. These exceptions cover the few
configuration defects that cannot be safely approximated.
"""


class TranscodeError(Exception):
    """Base class for transcode option errors."""

    pass


class InvalidConfigurationError(TranscodeError):
    """Raised when a configuration value cannot be interpreted.

    For example, a target resolution that is neither "original" nor a
    number: an ambiguous scaling target cannot be guessed.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending configuration field.
            value: The value that could not be interpreted.
            reason: Human-readable explanation.
        """
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class UnsupportedCodecError(TranscodeError):
    """Raised when a hardware backend cannot encode the target codec.

    Only raised when capability checking is requested explicitly; by default
    an unsupported combination is logged and the options are built anyway.
    """

    def __init__(
        self,
        backend: str,
        codec: str,
        supported: tuple[str, ...],
    ) -> None:
        """Initialize the error.

        Args:
            backend: Encoder backend name (e.g., "nvenc").
            codec: Requested target video codec (e.g., "vp9").
            supported: Codecs the backend can encode.
        """
        self.backend = backend
        self.codec = codec
        self.supported = supported
        super().__init__(
            f"{backend} does not support codec '{codec}'. "
            f"Supported: {', '.join(supported)}"
        )
