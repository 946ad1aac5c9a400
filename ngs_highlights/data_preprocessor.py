import pandas as pd
from dataclasses import dataclass
from typing import Optional
from ngs_highlights.exceptions import MalformedKeyError
from ngs_highlights.schema import RawPlaySchema
from ngs_highlights.window_engine import WindowEngine
from ngs_highlights.track_splitter import TrackSplitter
from ngs_highlights.physics_engine import PhysicsEngine
from ngs_highlights.fastest_engine import FastestPlayerEngine

PLAY_CONSTANT_COLS = ['playKey', 'playDescription', 'playDirection', 'yardsToGo', 'absoluteYardlineNumber']


@dataclass
class PreparedPlay:
    player_data: pd.DataFrame
    ball_data: pd.DataFrame
    first_frame: int
    final_frame: int

    play_key: int
    play_description: str
    play_direction: str
    yards_to_go: int
    los: float
    first_down_marker: float
    home_team: str
    away_team: str

    @property
    def frames(self):
        return sorted(self.player_data['frame'].unique())


def first_down_marker(los: float, yards_to_go: int, play_direction: str) -> float:
    return los - yards_to_go if play_direction == 'left' else los + yards_to_go


class DataPreProcessor:
    def __init__(self, ball_marker: Optional[str] = None):
        self.input_schema = RawPlaySchema
        self.window_engine = WindowEngine()
        self.splitter = TrackSplitter(ball_marker)
        self.physics_engine = PhysicsEngine()
        self.fastest_engine = FastestPlayerEngine()

    def _play_constants(self, df):
        """
        Every row of one play must agree on the play-level metadata.
        """
        constants = {}
        for col in PLAY_CONSTANT_COLS:
            values = df[col].dropna().unique()
            if col == 'playDescription' and len(values) == 0:
                constants[col] = ''
                continue
            if len(values) != 1:
                raise MalformedKeyError(f"Expected one '{col}' per play, found {list(values)[:5]}")
            constants[col] = values[0]

        return constants

    def _teams(self, player_df):
        home = player_df.loc[player_df['homeTeamFlag'] == 1, 'teamAbbr'].dropna().unique()
        away = player_df.loc[player_df['homeTeamFlag'] == 0, 'teamAbbr'].dropna().unique()

        if len(home) != 1 or len(away) != 1:
            raise MalformedKeyError(f"Expected one home and one away team, found {list(home)} / {list(away)}")

        return home[0], away[0]

    def run(self, raw_df: pd.DataFrame, window: bool = True) -> PreparedPlay:
        """
        MAIN ENTRY POINT.
        raw rows -> window -> (players, ball) -> velocity -> fastest flag
        """
        df = self.input_schema.validate(raw_df)
        constants = self._play_constants(df)

        # 1. Live-action window
        first_frame, final_frame = self.window_engine.resolve_interval(df)
        if window:
            df = self.window_engine.filter_window(df, first_frame, final_frame)

        # 2. Split
        player_df, ball_df = self.splitter.split(df)

        # 3. Kinematics
        player_df = self.physics_engine.decompose(player_df)

        # 4. Fastest player per frame & team
        player_df = self.fastest_engine.annotate_fastest(player_df)

        home_team, away_team = self._teams(player_df)

        los = float(constants['absoluteYardlineNumber'])
        yards_to_go = int(constants['yardsToGo'])
        direction = str(constants['playDirection'])

        return PreparedPlay(
            player_data=player_df,
            ball_data=ball_df,
            first_frame=first_frame,
            final_frame=final_frame,
            play_key=int(constants['playKey']),
            play_description=str(constants['playDescription']),
            play_direction=direction,
            yards_to_go=yards_to_go,
            los=los,
            first_down_marker=first_down_marker(los, yards_to_go, direction),
            home_team=home_team,
            away_team=away_team,
        )


def prepare_play(raw_df: pd.DataFrame, window: bool = True) -> PreparedPlay:
    return DataPreProcessor().run(raw_df, window=window)
