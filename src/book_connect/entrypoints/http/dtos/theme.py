from pydantic import BaseModel, Field


class ThemeUpdateDTO(BaseModel):
    theme: str = Field(
        description="Theme name (day or night, case-insensitive)",
        examples=["night"],
    )


class ThemeResponseDTO(BaseModel):
    theme: str
    color_dark: str  # CSS --color-dark RGB triplet
    color_light: str  # CSS --color-light RGB triplet
