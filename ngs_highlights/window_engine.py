import pandas as pd
from typing import Iterable, Optional, Tuple
from ngs_highlights.config import pipeline_config
from ngs_highlights.exceptions import MissingEventError

class WindowEngine:
    def __init__(self, start_event: Optional[str] = None, end_events: Optional[Iterable[str]] = None):
        self.start_event = start_event or pipeline_config.START_EVENT
        self.end_events = tuple(end_events or pipeline_config.END_EVENTS)

    def resolve_interval(self, df: pd.DataFrame) -> Tuple[int, int]:
        """
        Finds the [first_frame, final_frame] window of live action.

        A play can carry several 'line_set' tags (shifts, motion resets), so the
        LAST one is the snap-adjacent start. Likewise the last terminal tag wins.
        """
        start_frames = df.loc[df['event'] == self.start_event, 'frame']
        end_frames = df.loc[df['event'].isin(self.end_events), 'frame']

        missing = []
        if start_frames.empty:
            missing.append(self.start_event)
        if end_frames.empty:
            missing.extend(self.end_events)

        if missing:
            play_key = df['playKey'].iloc[0] if 'playKey' in df.columns and not df.empty else None
            raise MissingEventError(missing, play_key=play_key)

        return int(start_frames.max()), int(end_frames.max())

    def filter_window(self, df: pd.DataFrame, first_frame: int, final_frame: int) -> pd.DataFrame:
        return df[df['frame'].between(first_frame, final_frame)].copy()


def resolve_interval(df: pd.DataFrame) -> Tuple[int, int]:
    return WindowEngine().resolve_interval(df)
