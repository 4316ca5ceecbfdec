"""Analysis report data models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TopModel(BaseModel):
    """A ranked model recommendation."""

    model_config = ConfigDict(protected_namespaces=())

    model_name: str = Field(description="Name of the model")
    rank: int = Field(description="Rank, 1 being the best coding model", ge=1)
    primary_advantage: str = Field(description="The single strongest reason to pick this model")
    recommended_for: list[str] = Field(
        default_factory=list, description="Workloads this model suits, e.g. 'Backend API', 'Data Science'"
    )
    compatible_tools: list[str] = Field(
        default_factory=list, description="Coding tools that work well with it, e.g. 'Cursor', 'Continue.dev'"
    )

    @field_validator("recommended_for", "compatible_tools", mode="before")
    @classmethod
    def ensure_list(cls, v: object) -> list[str]:
        """Ensure tag fields are always lists of strings."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if isinstance(v, list):
            return [str(item) for item in v]
        return []


class Scenario(BaseModel):
    """A deployment scenario and the model suggested for it."""

    scenario: str = Field(description="Usage scenario, e.g. 'Local Deployment on Consumer Hardware'")
    suggested_model: str = Field(description="Model recommended for the scenario")
    reasoning: str = Field(description="One or two sentences explaining the choice")


# Model for Instructor (LLM response parsing)
class AnalysisReport(BaseModel):
    """Structured market report generated from the leaderboard."""

    executive_summary: str = Field(description="Short summary of which model currently leads for coding")
    top_models: list[TopModel] = Field(default_factory=list, description="Top models ranked for coding")
    scenario_matrix: list[Scenario] = Field(default_factory=list, description="Scenario recommendations")


class AnalysisResponse(BaseModel):
    """Analysis outcome: a structured report, or markdown when no report could be produced."""

    report: AnalysisReport | None = None
    markdown: str | None = None
