import pandera.pandas as pa
from pandera.typing import Series

class HighlightsListSchema(pa.DataFrameModel):
    """
    Validates the highlights index ('highlights_list.tsv').
    One row per highlight play.
    """
    playKey: Series[int] = pa.Field(coerce=True)
    gameKey: Series[int] = pa.Field(coerce=True)
    season: Series[int] = pa.Field(coerce=True)
    week: Series[float] = pa.Field(coerce=True, nullable=True)

    teamAbbr: Series[str]
    homeTeamAbbr: Series[str]
    visitorTeamAbbr: Series[str]
    playDescription: Series[str] = pa.Field(nullable=True)

    class Config:
        strict = 'filter'


class RawPlaySchema(pa.DataFrameModel):
    """
    Validates one play's tracking file ('play_data/*.tsv').
    One row per entity (22 players + ball) per frame.
    """
    playKey: Series[int] = pa.Field(coerce=True)
    frame: Series[int] = pa.Field(coerce=True, ge=0)
    event: Series[str] = pa.Field(nullable=True)

    homeTeamFlag: Series[float] = pa.Field(coerce=True, nullable=True) # Null for Ball
    teamAbbr: Series[str] = pa.Field(nullable=True)
    displayName: Series[str]
    gsisId: Series[str] = pa.Field(nullable=True) # Null for Ball
    jerseyNumber: Series[float] = pa.Field(coerce=True, nullable=True)
    position: Series[str] = pa.Field(nullable=True)
    positionGroup: Series[str] = pa.Field(nullable=True)

    x: Series[float] = pa.Field(coerce=True)
    y: Series[float] = pa.Field(coerce=True)
    s: Series[float] = pa.Field(coerce=True, ge=0, nullable=True)
    o: Series[float] = pa.Field(coerce=True, nullable=True)
    dir: Series[float] = pa.Field(coerce=True, nullable=True)

    playDescription: Series[str] = pa.Field(nullable=True)
    playDirection: Series[str] = pa.Field(isin=["left", "right"])
    yardsToGo: Series[int] = pa.Field(coerce=True)
    absoluteYardlineNumber: Series[float] = pa.Field(coerce=True, ge=0, le=120)

    class Config:
        strict = 'filter'


class BallFrameSchema(pa.DataFrameModel):
    """
    Validates the ball rows produced by the TrackSplitter.
    """
    frame: Series[int] = pa.Field(coerce=True)
    event: Series[str] = pa.Field(nullable=True)
    teamAbbr: Series[str] = pa.Field(nullable=True)
    displayName: Series[str]

    x: Series[float] = pa.Field(coerce=True)
    y: Series[float] = pa.Field(coerce=True)
    s: Series[float] = pa.Field(coerce=True, nullable=True)

    class Config:
        strict = 'filter'


class PlayerFrameSchema(pa.DataFrameModel):
    """
    Validates the player rows produced by the TrackSplitter.
    """
    frame: Series[int] = pa.Field(coerce=True)
    event: Series[str] = pa.Field(nullable=True)

    homeTeamFlag: Series[int] = pa.Field(coerce=True, isin=[0, 1])
    teamAbbr: Series[str] = pa.Field(nullable=True)
    displayName: Series[str]
    gsisId: Series[str] = pa.Field(nullable=True)
    jerseyNumber: Series[float] = pa.Field(coerce=True, nullable=True)
    position: Series[str] = pa.Field(nullable=True)
    positionGroup: Series[str] = pa.Field(nullable=True)

    x: Series[float] = pa.Field(coerce=True)
    y: Series[float] = pa.Field(coerce=True)
    s: Series[float] = pa.Field(coerce=True, ge=0)
    o: Series[float] = pa.Field(coerce=True, nullable=True)
    dir: Series[float] = pa.Field(coerce=True, nullable=True)

    class Config:
        strict = 'filter'


class VelocitySchema(PlayerFrameSchema):
    """
    Validates the output of 'physics_engine.py'.
    """
    dir_rad: Series[float] = pa.Field(coerce=True, nullable=True)
    v_x: Series[float] = pa.Field(coerce=True, nullable=True)
    v_y: Series[float] = pa.Field(coerce=True, nullable=True)

    class Config:
        strict = 'filter'


class FastestFlagSchema(pa.DataFrameModel):
    """
    Validates the flag table merged back onto the player rows.
    Exactly one row per (frame, teamAbbr).
    """
    frame: Series[int] = pa.Field(coerce=True)
    gsisId: Series[str]
    isFastestFlag: Series[int] = pa.Field(coerce=True, isin=[1])

    class Config:
        strict = 'filter'
        unique = ['frame', 'gsisId']


class AnnotatedPlayerSchema(VelocitySchema):
    """
    Validates the output of 'fastest_engine.py' (animation-ready player rows).
    """
    isFastestFlag: Series[int] = pa.Field(coerce=True, isin=[0, 1])

    class Config:
        strict = 'filter'
