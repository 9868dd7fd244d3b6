# swatch_api/models/requests.py
from pydantic import BaseModel, ConfigDict

from swatch.geometry import SwatchBox, SwatchStyle


class SwatchRequest(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=True)

    color: str
    style: SwatchStyle = "square"
    size: float = 20
    text: str = ""
    text_color: str = "#FFFFFF"
    top: float = 0
    bottom: float = 0
    left: float = 0
    right: float = 0

    def box(self) -> SwatchBox:
        return SwatchBox(self.size, self.text, self.top, self.bottom, self.left, self.right)

    @property
    def width(self) -> float:
        return self.box().width

    @property
    def height(self) -> float:
        return self.box().height
