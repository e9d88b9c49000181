"""Pydantic models for arccos results and series settings."""
from pydantic import BaseModel, ConfigDict, Field


class SeriesSettings(BaseModel):
    """
    Cutoffs of the arcsin Taylor series.

    The defaults are the calculator's fixed contract; other values are only
    useful to probe the series behaviour.
    """

    model_config = ConfigDict(frozen=True)

    max_terms: int = Field(default=100, ge=1, description="Upper bound of the series loop")
    tolerance: float = Field(default=1e-15, ge=0.0, description="Absolute size below which a term stops the series")


class ArccosResult(BaseModel):
    """Outcome of a successful arccos evaluation."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., ge=-1.0, le=1.0, description="Input value x")
    radians: float = Field(..., description="arccos(x) in radians")
    degrees: float = Field(..., description="arccos(x) in degrees")
    duration_ms: float = Field(..., ge=0.0, description="Wall-clock time spent in the engine")

    def format(self) -> str:
        """
        Render the result the way the calculator displays it.

        :return: Three-line summary with radians, degrees and timing
        :rtype: str
        """
        return (
            f"arccos({self.value:.6f}) = {self.radians:.10f} radians\n"
            f"≈ {self.degrees:.6f} degrees\n"
            f"Computed in {self.duration_ms:.3f} ms"
        )
