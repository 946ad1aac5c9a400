import os
import re
import pandas as pd
from typing import Optional
from ngs_highlights.config import pipeline_config
from ngs_highlights.schema import HighlightsListSchema, RawPlaySchema


class DataLoader:
    def __init__(self, data_source: Optional[str] = None, highlights_file: Optional[str] = None):
        """
        Points the loader at a local copy or the raw URL of the highlights repository.
        Nothing is read until a fetch is requested.
        """
        self.data_source = (data_source or pipeline_config.DATA_SOURCE).rstrip('/')
        self.highlights_file = highlights_file or pipeline_config.HIGHLIGHTS_FILE
        self.is_remote = re.match(r'^[a-z][a-z0-9+.-]*://', self.data_source) is not None

        self._highlights = None

    def _resolve(self, *parts) -> str:
        if self.is_remote:
            return '/'.join([self.data_source, *parts])

        path = os.path.join(self.data_source, *parts)
        if not os.path.exists(path):
            raise FileNotFoundError(f"Missing Highlights File: {path}")
        return path

    def _read_tsv(self, location: str) -> pd.DataFrame:
        return pd.read_csv(location, sep='\t', low_memory=False)

    def load_highlights(self) -> pd.DataFrame:
        """
        Loads (once) the full highlights index.
        """
        if self._highlights is None:
            df = self._read_tsv(self._resolve(self.highlights_file))
            self._highlights = HighlightsListSchema.validate(df)

        return self._highlights

    def fetch_highlights_list(self, team: Optional[str] = None, season: Optional[int] = None) -> pd.DataFrame:
        """
        Lists highlight plays, optionally filtered by team abbreviation and/or season.
        """
        df = self.load_highlights()

        mask = pd.Series(True, index=df.index)
        if team is not None:
            mask &= df['teamAbbr'] == team
        if season is not None:
            mask &= df['season'] == int(season)

        return df[mask].reset_index(drop=True)

    def play_file_name(self, play_row) -> str:
        return (f"{int(play_row['season'])}_{play_row['teamAbbr']}_"
                f"{int(play_row['gameKey'])}_{int(play_row['playKey'])}.tsv")

    def fetch_play_data(self, play_key: int) -> pd.DataFrame:
        """
        Loads the tracking rows of one highlight play.
        The file name is derived from the play's row in the highlights index.
        """
        highlights = self.load_highlights()
        match = highlights[highlights['playKey'] == int(play_key)]

        if match.empty:
            raise KeyError(f"Play {play_key} is not in the highlights list")

        file_name = self.play_file_name(match.iloc[0])
        print(f"   -> Fetching play {play_key} ({file_name})...")

        df = self._read_tsv(self._resolve(pipeline_config.PLAY_DATA_DIR, file_name))

        return RawPlaySchema.validate(df)


def fetch_highlights_list(team: Optional[str] = None, season: Optional[int] = None,
                          data_source: Optional[str] = None) -> pd.DataFrame:
    return DataLoader(data_source).fetch_highlights_list(team=team, season=season)


def fetch_play_data(play_key: int, data_source: Optional[str] = None) -> pd.DataFrame:
    return DataLoader(data_source).fetch_play_data(play_key)
