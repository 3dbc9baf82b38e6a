"""Central place for Palette Plot default settings."""

# Palette
INITIAL_PALETTE: tuple[str, ...] = (
    "#440154",
    "#482475",
    "#414487",
    "#355f8d",
    "#2a788e",
    "#21918c",
    "#22a884",
    "#44bf70",
    "#7ad151",
    "#bddf26",
    "#fde725",
)

# Catalog
DEFAULT_SPACE: str = "oklch"  # Spaces charted at startup
TEST_COLOR: str = "#000"  # Neutral color every catalog entry must be readable on
FALLBACK_RANGE: tuple[float, float] = (0.0, 1.0)
SERIALIZE_SPACE: str = "srgb"  # Textual form is always sRGB hex

# Friendly space names for chart labels (unknown spaces fall back to their id)
SPACE_DISPLAY_NAMES: dict[str, str] = {
    "srgb": "sRGB",
    "srgb-linear": "sRGB-linear",
    "hsl": "HSL",
    "hsv": "HSV",
    "hwb": "HWB",
    "lab": "CIE Lab",
    "lch": "LCH",
    "lab-d65": "CIE Lab D65",
    "lch-d65": "LCH D65",
    "oklab": "OKLab",
    "oklch": "OKLCh",
    "okhsl": "Okhsl",
    "okhsv": "Okhsv",
    "luv": "CIE Luv",
    "lchuv": "LChuv",
    "hsluv": "HSLuv",
    "hpluv": "HPLuv",
    "xyz-d65": "XYZ",
    "xyz-d50": "XYZ D50",
    "display-p3": "P3",
    "display-p3-linear": "P3-linear",
    "a98-rgb": "Adobe 98 RGB",
    "a98-rgb-linear": "Linear Adobe 98 RGB",
    "prophoto-rgb": "ProPhoto",
    "prophoto-rgb-linear": "Linear ProPhoto",
    "rec2020": "REC.2020",
    "rec2020-linear": "Linear REC.2020",
    "rec2100-pq": "REC.2100-PQ",
    "rec2100-hlg": "REC.2100-HLG",
    "jzazbz": "Jzazbz",
    "jzczhz": "JzCzHz",
    "ictcp": "ICtCp",
    "cam16-jmh": "CAM16-JMh",
    "hct": "HCT",
}

# Chart geometry (pixels, drawlist-local)
CHART_HEIGHT: int = 170
CHART_MIN_WIDTH: int = 320
CHART_MARGIN_LEFT: float = 56.0  # Room for y-axis tick labels
CHART_MARGIN_RIGHT: float = 14.0
CHART_MARGIN_TOP: float = 8.0
CHART_MARGIN_BOTTOM: float = 22.0
CHART_Y_TICKS: int = 4
POINT_RADIUS: float = 5.0
POINT_BORDER: float = 2.0

# Swatch strip
SWATCH_HEIGHT: int = 48

# Viewport
VIEWPORT_WIDTH: int = 1100
VIEWPORT_HEIGHT: int = 900
TEXT_FIELD_HEIGHT: int = 60

# Link shown beside the bulk text field
D3_SCHEMES_URL: str = "https://observablehq.com/@d3/color-schemes"

# Logging
LOG_LEVEL_ENV: str = "PALETTEPLOT_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "WARNING"
