import numpy as np
from matplotlib.colors import to_rgb

NFL_TEAM_COLORS = {
    'BAL': {'primary': '#241773', 'secondary': '#000000', 'alternate': '#9E7C0C'},
    'CIN': {'primary': '#FB4F14', 'secondary': '#000000'},
    'CLE': {'primary': '#311D00', 'secondary': '#FF3C00'},
    'PIT': {'primary': '#FFB612', 'secondary': '#101820', 'alternate': '#003087'},
    'BUF': {'primary': '#00338D', 'secondary': '#C60C30'},
    'MIA': {'primary': '#008E97', 'secondary': '#FC4C02', 'alternate': '#005778'},
    'NE': {'primary': '#002244', 'secondary': '#C60C30', 'alternate': '#B0B7BC'},
    'NYJ': {'primary': '#125740', 'secondary': '#000000', 'alternate': '#FFFFFF'},
    'HOU': {'primary': '#03202F', 'secondary': '#A71930'},
    'IND': {'primary': '#002C5F', 'secondary': '#A2AAAD'},
    'JAX': {'primary': '#101820', 'secondary': '#D7A22A', 'alternate': '#9F792C'},
    'TEN': {'primary': '#0C2340', 'secondary': '#4B92DB', 'alternate': '#C8102E'},
    'DEN': {'primary': '#FB4F14', 'secondary': '#002244'},
    'KC': {'primary': '#E31837', 'secondary': '#FFB81C'},
    'LV': {'primary': '#000000', 'secondary': '#A5ACAF'},
    'LAC': {'primary': '#0080C6', 'secondary': '#FFC20E', 'alternate': '#FFFFFF'},
    'CHI': {'primary': '#0B162A', 'secondary': '#C83803'},
    'DET': {'primary': '#0076B6', 'secondary': '#B0B7BC', 'alternate': '#000000'},
    'GB': {'primary': '#203731', 'secondary': '#FFB612'},
    'MIN': {'primary': '#4F2683', 'secondary': '#FFC62F'},
    'DAL': {'primary': '#003594', 'secondary': '#041E42', 'alternate': '#869397'},
    'NYG': {'primary': '#0B2265', 'secondary': '#A71930', 'alternate': '#A5ACAF'},
    'PHI': {'primary': '#004C54', 'secondary': '#A5ACAF', 'alternate': '#000000'},
    'WAS': {'primary': '#5A1414', 'secondary': '#FFB612'},
    'ATL': {'primary': '#A71930', 'secondary': '#000000', 'alternate': '#A5ACAF'},
    'CAR': {'primary': '#0085CA', 'secondary': '#101820', 'alternate': '#BFC0BF'},
    'NO': {'primary': '#D3BC8D', 'secondary': '#101820'},
    'TB': {'primary': '#D50A0A', 'secondary': '#FF7900', 'alternate': '#B1BABF'},
    'ARI': {'primary': '#97233F', 'secondary': '#000000', 'alternate': '#FFB612'},
    'LAR': {'primary': '#003594', 'secondary': '#FFA300', 'alternate': '#FF8200'},
    'SF': {'primary': '#AA0000', 'secondary': '#B3995D'},
    'SEA': {'primary': '#002244', 'secondary': '#69BE28', 'alternate': '#A5ACAF'}
}

# Older NGS files still use relocated / legacy codes
TEAM_ALIASES = {
    'LA': 'LAR',
    'STL': 'LAR',
    'OAK': 'LV',
    'SD': 'LAC',
    'WSH': 'WAS',
}

# Below this RGB distance two primaries read as the same colour on the field
MIN_COLOR_DISTANCE = 0.25


def _team_entry(team):
    code = TEAM_ALIASES.get(team, team)
    if code not in NFL_TEAM_COLORS:
        raise KeyError(f"Unknown team abbreviation: {team}")
    return NFL_TEAM_COLORS[code]


def color_distance(a, b):
    return float(np.linalg.norm(np.array(to_rgb(a)) - np.array(to_rgb(b))))


def fetch_team_colors(home_team, away_team, diverge=False):
    """
    Returns (home_primary, home_secondary, away_primary, away_secondary).

    With diverge=True the away side switches to its secondary colour when
    both primaries are too close to tell apart.
    """
    home = _team_entry(home_team)
    away = _team_entry(away_team)

    home_primary, home_secondary = home['primary'], home['secondary']
    away_primary, away_secondary = away['primary'], away['secondary']

    if diverge and color_distance(home_primary, away_primary) < MIN_COLOR_DISTANCE:
        away_primary, away_secondary = away_secondary, away_primary

    return home_primary, home_secondary, away_primary, away_secondary
