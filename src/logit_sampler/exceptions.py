"""Exception hierarchy for logit-sampler.

All exceptions derive from SamplerError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class SamplerError(Exception):
    """Base exception for all logit-sampler errors."""


class InvalidParameterError(SamplerError):
    """A sampling strategy was configured with an invalid value.

    Raised for a temperature outside [0, 2], a non-positive k, or a
    probability threshold outside the open interval (0, 1).
    """


class ConfigValidationError(SamplerError):
    """Per-request overrides contain unknown or non-overridable keys."""


class RandomSourceError(SamplerError):
    """The randomness source could not produce a value."""


class TokenSelectionError(SamplerError):
    """Token selection failed."""


class NoValidTokensError(TokenSelectionError):
    """Every position was excluded before reaching a terminal selector."""


class SelectionFailedError(TokenSelectionError):
    """The weighted draw could not produce a choice.

    Raised when the weights are degenerate (non-finite or zero total) or
    the randomness source fails.
    """
