import pandas as pd
from ngs_highlights.exceptions import MalformedKeyError
from ngs_highlights.schema import FastestFlagSchema, AnnotatedPlayerSchema

class FastestPlayerEngine:
    def __init__(self):
        self.flag_schema = FastestFlagSchema
        self.output_schema = AnnotatedPlayerSchema

    def _check_keys(self, df: pd.DataFrame):
        for col in ['teamAbbr', 'gsisId']:
            bad = df[col].isna()
            if bad.any():
                frames = sorted(df.loc[bad, 'frame'].unique())[:5]
                raise MalformedKeyError(
                    f"{int(bad.sum())} player rows without '{col}' (frames {frames})")

    def fastest_flags(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Picks the single fastest player of every (frame, team).
        Ties on speed go to the lowest gsisId so each group has exactly one flag.
        """
        self._check_keys(df)

        ranked = df.sort_values(
            ['frame', 'teamAbbr', 's', 'gsisId'],
            ascending=[True, True, False, True],
            kind='mergesort'
        )
        flags = ranked.drop_duplicates(subset=['frame', 'teamAbbr'], keep='first')[['frame', 'gsisId']].copy()
        flags['isFastestFlag'] = 1

        return self.flag_schema.validate(flags)

    def annotate_fastest(self, df: pd.DataFrame) -> pd.DataFrame:
        flags = self.fastest_flags(df)

        # MERGE: Left join the flags back onto every player row
        annotated = df.drop(columns=['isFastestFlag'], errors='ignore').merge(
            flags, on=['frame', 'gsisId'], how='left')
        annotated.index = df.index
        annotated['isFastestFlag'] = annotated['isFastestFlag'].fillna(0).astype(int)

        return self.output_schema.validate(annotated)


def annotate_fastest(df: pd.DataFrame) -> pd.DataFrame:
    return FastestPlayerEngine().annotate_fastest(df)
