from ngs_highlights.load_data import fetch_highlights_list, fetch_play_data
from ngs_highlights.window_engine import resolve_interval
from ngs_highlights.track_splitter import split
from ngs_highlights.physics_engine import decompose
from ngs_highlights.fastest_engine import annotate_fastest
from ngs_highlights.data_preprocessor import prepare_play, PreparedPlay
from ngs_highlights.analysis.team_colors import fetch_team_colors
from ngs_highlights.analysis.field import plot_field
from ngs_highlights.analysis.frame_plotter import plot_play_frame, plot_play_sequence
