import pandas as pd
import plotly.express as px
from ngs_highlights.config import pipeline_config
from ngs_highlights.analysis.team_colors import fetch_team_colors

FASTEST_ROLE = 'Fastest'
BALL_ROLE = 'Football'


class VizService:
    @staticmethod
    def animation_frame_data(play):
        """
        Stacks players and ball into one long table with a visual role per row.
        """
        players = play.player_data.copy()
        players['visual_role'] = players['teamAbbr']
        players.loc[players['isFastestFlag'] == 1, 'visual_role'] = FASTEST_ROLE
        players['visual_size'] = 10
        players['visual_label'] = players['jerseyNumber'].map(
            lambda v: '' if pd.isna(v) else str(int(v)))

        ball = play.ball_data.copy()
        ball['visual_role'] = BALL_ROLE
        ball['visual_size'] = 5
        ball['visual_label'] = ''

        cols = ['frame', 'displayName', 'x', 'y', 's', 'visual_role', 'visual_size', 'visual_label']
        return pd.concat([players[cols], ball[cols]], ignore_index=True).sort_values(['frame', 'displayName'])

    @staticmethod
    def create_field_animation(play):
        df = VizService.animation_frame_data(play)
        home_primary, _, away_primary, _ = fetch_team_colors(play.home_team, play.away_team, diverge=True)

        color_map = {
            play.home_team: home_primary,
            play.away_team: away_primary,
            FASTEST_ROLE: pipeline_config.FASTEST_COLOR,
            BALL_ROLE: pipeline_config.BALL_COLOR,
        }

        fig = px.scatter(
            df, x='x', y='y', animation_frame='frame', animation_group='displayName',
            color='visual_role', color_discrete_map=color_map,
            size='visual_size', size_max=14,
            text='visual_label', hover_name='displayName', hover_data={'s': ':.2f'},
            range_x=[0, pipeline_config.FIELD_LENGTH], range_y=[0, pipeline_config.FIELD_WIDTH],
            title=play.play_description
        )

        VizService._add_nfl_field_layout(fig, play)

        fig.update_traces(textposition='middle center', textfont=dict(color='white', size=8))

        # Playback at the tracking rate
        frame_ms = 1000 / pipeline_config.FPS
        fig.layout.updatemenus[0].buttons[0].args[1]["frame"]["duration"] = frame_ms
        fig.layout.updatemenus[0].buttons[0].args[1]["transition"]["duration"] = 0

        return fig

    @staticmethod
    def _add_nfl_field_layout(fig, play):
        """Draws the field using shapes and annotations."""
        length = pipeline_config.FIELD_LENGTH
        width = pipeline_config.FIELD_WIDTH

        fig.update_layout(
            plot_bgcolor='#567D46',
            xaxis=dict(showgrid=False, zeroline=False, showticklabels=False, fixedrange=True),
            yaxis=dict(showgrid=False, zeroline=False, showticklabels=False, fixedrange=True,
                       scaleanchor='x', scaleratio=1),
            width=pipeline_config.WIDTH_PX,
            height=pipeline_config.HEIGHT_PX,
            margin=dict(l=20, r=20, t=40, b=20),
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        )

        shapes = []
        annotations = []

        # End zones
        shapes.append(dict(type="rect", x0=0, y0=0, x1=10, y1=width, line_width=0, fillcolor="#436137", layer="below"))
        shapes.append(dict(type="rect", x0=length - 10, y0=0, x1=length, y1=width, line_width=0, fillcolor="#436137", layer="below"))

        line_color = "rgba(255, 255, 255, 0.8)"
        for x in range(10, int(length) - 9, 5):
            lw = 3 if x in [10, 60, 110] else 1
            shapes.append(dict(type="line", x0=x, y0=0, x1=x, y1=width, line=dict(color=line_color, width=lw), layer="below"))

            if x in [20, 30, 40, 50, 60, 70, 80, 90, 100]:
                label = str(50 - abs(x - 60))
                annotations.append(dict(x=x, y=4, text=label, showarrow=False, font=dict(color=line_color, size=14)))
                annotations.append(dict(x=x, y=width - 4, text=label, showarrow=False, font=dict(color=line_color, size=14)))

        # Line of scrimmage / first down
        shapes.append(dict(type="line", x0=play.los, y0=0, x1=play.los, y1=width,
                           line=dict(color=pipeline_config.LOS_COLOR, width=2)))
        shapes.append(dict(type="line", x0=play.first_down_marker, y0=0, x1=play.first_down_marker, y1=width,
                           line=dict(color=pipeline_config.FIRST_DOWN_COLOR, width=2)))

        fig.update_layout(shapes=shapes, annotations=annotations)


def create_field_animation(play):
    return VizService.create_field_animation(play)
