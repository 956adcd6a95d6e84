from pydantic import BaseModel, ConfigDict, Field


class StyleSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    color_scheme: str = Field(default="blue", alias="colorScheme")
    font_size: str = Field(default="base", alias="fontSize")
    layout: str = "grid"
    background_style: str = Field(default="gradient", alias="backgroundStyle")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
