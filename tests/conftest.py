import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

PLAY_KEY = 242
DESCRIPTION = "(4:21) R.Wilson pass short right to T.Lockett for 12 yards (M.Peters)."


def make_play_rows(frames=(1, 2, 3), events=None, speeds=None, home='SEA', away='LA',
                   direction='right', los=35.0, yards_to_go=10):
    """
    Synthetic NGS play: two players per team plus the ball, for every frame.
    speeds maps team -> per-player speed (same in every frame).
    """
    events = {1: 'line_set', 3: 'tackle'} if events is None else events
    speeds = speeds or {home: [1.0, 2.0], away: [3.0, 1.0]}

    rows = []
    for frame in frames:
        event = events.get(frame)
        for team in (home, away):
            for i, speed in enumerate(speeds[team]):
                rows.append({
                    'frame': frame,
                    'homeTeamFlag': 1 if team == home else 0,
                    'teamAbbr': team,
                    'displayName': f"{team} Player {i}",
                    'gsisId': f"00-{team}-{i}",
                    'jerseyNumber': 10 + i,
                    'position': 'WR',
                    'positionGroup': 'WR',
                    'x': 30.0 + 5 * i + frame,
                    'y': 20.0 + 3 * i + (10 if team == away else 0),
                    's': speed,
                    'o': 0.0,
                    'dir': 90.0,
                    'event': event,
                })
        rows.append({
            'frame': frame,
            'homeTeamFlag': np.nan,
            'teamAbbr': None,
            'displayName': 'football',
            'gsisId': None,
            'jerseyNumber': np.nan,
            'position': None,
            'positionGroup': None,
            'x': los + frame,
            'y': 26.0,
            's': 0.5,
            'o': np.nan,
            'dir': np.nan,
            'event': event,
        })

    df = pd.DataFrame(rows)
    df['playKey'] = PLAY_KEY
    df['playDescription'] = DESCRIPTION
    df['playDirection'] = direction
    df['yardsToGo'] = yards_to_go
    df['absoluteYardlineNumber'] = los
    return df


@pytest.fixture
def make_play():
    return make_play_rows


@pytest.fixture
def play_rows():
    return make_play_rows()


@pytest.fixture
def prepared_play(play_rows):
    from ngs_highlights.data_preprocessor import DataPreProcessor
    return DataPreProcessor().run(play_rows)


def make_highlights():
    return pd.DataFrame({
        'playKey': [242, 3190, 88],
        'gameKey': [2019091500, 2019092200, 2018100700],
        'season': [2019, 2019, 2018],
        'week': [2, 3, 5],
        'teamAbbr': ['SEA', 'SEA', 'LA'],
        'homeTeamAbbr': ['SEA', 'NO', 'SEA'],
        'visitorTeamAbbr': ['LA', 'SEA', 'LA'],
        'playDescription': ['pass right', 'run left', 'sack'],
        'extraColumn': [1, 2, 3],
    })


@pytest.fixture
def data_dir(tmp_path, play_rows):
    """
    Local copy of the highlights repository: the index plus play 242's tracking file.
    """
    make_highlights().to_csv(tmp_path / 'highlights_list.tsv', sep='\t', index=False)

    (tmp_path / 'play_data').mkdir()
    play_rows.to_csv(tmp_path / 'play_data' / '2019_SEA_2019091500_242.tsv', sep='\t', index=False)
    return str(tmp_path)
