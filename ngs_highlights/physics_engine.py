import pandas as pd
import numpy as np
from ngs_highlights.schema import VelocitySchema

class PhysicsEngine:
    def __init__(self):
        self.output_schema = VelocitySchema

    def decompose(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Splits each player's (speed, heading) pair into Cartesian velocity.

        NGS headings are 0 deg = towards the far sideline (+y), increasing
        clockwise, so x takes the sine and y the cosine.
        """
        df = df.copy()

        df['dir_rad'] = df['dir'] * np.pi / 180
        df['v_x'] = np.sin(df['dir_rad']) * df['s']
        df['v_y'] = np.cos(df['dir_rad']) * df['s']

        return self.output_schema.validate(df)


def decompose(df: pd.DataFrame) -> pd.DataFrame:
    return PhysicsEngine().decompose(df)
