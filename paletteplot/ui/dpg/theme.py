"""Neutral gray theme for Palette Plot.

Palette colors are the content here, so the chrome stays desaturated to
avoid biasing how swatches and chart points are perceived.
"""

try:
    import dearpygui.dearpygui as dpg
except ImportError:
    dpg = None

# Chart drawing colors (RGBA 0-255)
CHART_BG = (28, 28, 30, 255)
CHART_FRAME = (70, 70, 74, 255)
CHART_GRID = (52, 52, 56, 255)
CHART_LINE = (190, 190, 196, 255)
CHART_TICK_TEXT = (140, 140, 146, 255)
POINT_OUTLINE = (235, 235, 240, 255)
POINT_OUTLINE_ACTIVE = (255, 210, 90, 255)

# Text accents
TITLE = (220, 220, 226)
SUBTLE = (130, 130, 136)
LINK = (90, 180, 170)
ERROR = (255, 120, 110)


def apply_theme() -> None:
    """Apply the neutral gray theme globally."""
    if dpg is None:
        return

    with dpg.theme() as theme:
        with dpg.theme_component(dpg.mvAll):
            # Backgrounds
            dpg.add_theme_color(dpg.mvThemeCol_WindowBg, (36, 36, 38, 255))
            dpg.add_theme_color(dpg.mvThemeCol_ChildBg, (32, 32, 34, 255))
            dpg.add_theme_color(dpg.mvThemeCol_PopupBg, (44, 44, 47, 255))
            dpg.add_theme_color(dpg.mvThemeCol_ModalWindowDimBg, (0, 0, 0, 150))

            # Borders
            dpg.add_theme_color(dpg.mvThemeCol_Border, (72, 72, 76, 120))

            # Inputs
            dpg.add_theme_color(dpg.mvThemeCol_FrameBg, (54, 54, 58, 255))
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgHovered, (64, 64, 68, 255))
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgActive, (74, 74, 78, 255))
            dpg.add_theme_color(dpg.mvThemeCol_CheckMark, (200, 200, 206, 255))

            # Buttons and headers
            dpg.add_theme_color(dpg.mvThemeCol_Button, (62, 62, 66, 255))
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, (76, 76, 80, 255))
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, (90, 90, 96, 255))
            dpg.add_theme_color(dpg.mvThemeCol_Header, (52, 52, 56, 255))
            dpg.add_theme_color(dpg.mvThemeCol_HeaderHovered, (64, 64, 68, 255))
            dpg.add_theme_color(dpg.mvThemeCol_HeaderActive, (74, 74, 78, 255))

            # Text
            dpg.add_theme_color(dpg.mvThemeCol_Text, (222, 222, 226, 255))
            dpg.add_theme_color(dpg.mvThemeCol_TextDisabled, (130, 130, 136, 255))
            dpg.add_theme_color(dpg.mvThemeCol_TextSelectedBg, (90, 90, 110, 180))

            dpg.add_theme_style(dpg.mvStyleVar_FrameRounding, 3.0)
            dpg.add_theme_style(dpg.mvStyleVar_ChildRounding, 3.0)
            dpg.add_theme_style(dpg.mvStyleVar_FramePadding, 6, 4)
            dpg.add_theme_style(dpg.mvStyleVar_ItemSpacing, 8, 6)
            dpg.add_theme_style(dpg.mvStyleVar_WindowPadding, 14, 12)
            dpg.add_theme_style(dpg.mvStyleVar_WindowBorderSize, 0)

    dpg.bind_theme(theme)
