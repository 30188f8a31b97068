from pydantic import BaseModel, ConfigDict, Field


class PluginConfig(BaseModel):
    """Validated configuration of the cloudwatch reporting plugin."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(min_length=1)
    region: str = Field(min_length=1)
    # pairs keep the configured order and make the model hashable
    dimensions: tuple[tuple[str, str], ...] | None = None

    @property
    def dimensions_mapping(self) -> dict[str, str] | None:
        if self.dimensions is None:
            return None
        return dict(self.dimensions)
