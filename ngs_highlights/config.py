from dataclasses import dataclass
from typing import Tuple

# ==========================================
# CONFIGURATION
# ==========================================
@dataclass
class PipelineConfig:
    # Local directory or raw URL base of the highlights repository
    DATA_SOURCE: str = "https://raw.githubusercontent.com/asonty/ngs_highlights/master"
    HIGHLIGHTS_FILE: str = "highlights_list.tsv"
    PLAY_DATA_DIR: str = "play_data"
    OUTPUT_DIR: str = "data/visuals"

    # --- TRACKING CONVENTIONS ---
    BALL_MARKER: str = "football"
    START_EVENT: str = "line_set"
    END_EVENTS: Tuple[str, ...] = ("tackle", "touchdown", "out_of_bounds")

    # --- FIELD GEOMETRY (yards) ---
    FIELD_LENGTH: float = 120.0
    FIELD_WIDTH: float = 160 / 3

    # --- ANIMATION ---
    FPS: int = 10
    END_PAUSE: int = 10
    WIDTH_PX: int = 850
    HEIGHT_PX: int = 500
    DPI: int = 100

    # --- VISUAL IDENTITY ---
    BALL_COLOR: str = "#935E38"
    FASTEST_COLOR: str = "#FFFF00"
    LOS_COLOR: str = "#0D41E1"
    FIRST_DOWN_COLOR: str = "#FDE725"
    ARROW_SCALE: float = 0.5

    SEQUENCE_FRAMES: int = 4
    SEQUENCE_COLS: int = 2

    @property
    def figsize(self):
        return (self.WIDTH_PX / self.DPI, self.HEIGHT_PX / self.DPI)


pipeline_config = PipelineConfig()
