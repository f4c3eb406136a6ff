"""Exceptions raised by hydrowaves.

All failures in the excitation pipeline indicate a setup defect, so they are
raised immediately and never replaced by a fallback value.
"""


class WaveConfigurationError(ValueError):
    """Invalid wave configuration or input data."""


class ElevationParseError(WaveConfigurationError):
    """A line of an elevation record does not match ``<time> : <elevation>``.

    Attributes:
        line_number: 1-based line number in the record.
        line: Offending line without its trailing newline.
    """

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Could not parse line {line_number}: {line!r}.")


class ConvolutionBoundsError(RuntimeError):
    """Convolution requested elevation outside the precomputed horizon.

    Attributes:
        time: Time at which the elevation was requested.
        t_min: First time of the elevation record.
        t_max: Last time of the elevation record.
    """

    def __init__(self, time: float, t_min: float, t_max: float):
        self.time = time
        self.t_min = t_min
        self.t_max = t_max
        super().__init__(
            "Excitation convolution: free surface elevation requested at "
            f"{time} which is not in the precomputed range [{t_min}, {t_max}]."
        )


class SpectrumUnavailableError(RuntimeError):
    """The spectrum was requested but never computed (loaded elevation mode)."""
