import pandas as pd
from typing import Optional, Tuple
from ngs_highlights.config import pipeline_config
from ngs_highlights.schema import PlayerFrameSchema, BallFrameSchema

class TrackSplitter:
    def __init__(self, ball_marker: Optional[str] = None):
        self.ball_marker = ball_marker or pipeline_config.BALL_MARKER
        self.player_schema = PlayerFrameSchema
        self.ball_schema = BallFrameSchema

        # We derive the columns from the schema keys to ensure we keep what we need
        self.player_cols = list(self.player_schema.to_schema().columns.keys())
        self.ball_cols = list(self.ball_schema.to_schema().columns.keys())

    def split(self, df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """
        Partitions a play's rows into (player_rows, ball_rows).
        Ball rows are exactly the ones named with the ball marker.
        """
        # Stable sort keeps the original entity order inside a frame
        df = df.sort_values('frame', kind='mergesort')

        is_ball = df['displayName'] == self.ball_marker

        player_df = df.loc[~is_ball, self.player_cols].copy()
        ball_df = df.loc[is_ball, self.ball_cols].copy()

        return self.player_schema.validate(player_df), self.ball_schema.validate(ball_df)


def split(df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    return TrackSplitter().split(df)
