"""
Errors Module - Failure types raised along the forecast pipeline

Stage-local errors describe what went wrong inside one step.
Pipeline errors describe which step failed and chain the stage-local error.
"""


class ForecastError(Exception):
    """Base class for everything the forecast pipeline raises"""


class UpstreamRequestError(ForecastError):
    """The provider could not be reached or answered with an error status"""


class DecodeError(ForecastError):
    """The provider answered with a body that does not match the expected shape"""


class NoPeriodsAvailable(ForecastError):
    """The forecast payload contains no periods"""

    def __init__(self):
        super().__init__("No forecast periods available")


class UnsupportedUnit(ForecastError):
    """The period temperature uses a unit other than Fahrenheit"""

    def __init__(self, unit):
        self.unit = unit
        super().__init__(f"Unsupported temperature unit for USA: {unit}")


class PipelineError(ForecastError):
    """A pipeline stage failed, `stage` names it"""

    stage = None

    def __init__(self, message):
        super().__init__(f"{self.stage}: {message}")


class ResolutionFailed(PipelineError):
    stage = "resolving"


class FetchFailed(PipelineError):
    stage = "fetching"


class ExtractionFailed(PipelineError):
    stage = "extracting"
