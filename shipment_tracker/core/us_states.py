"""
US States Data - 50 states + District of Columbia, plus inhabited territories
Names match the values stored on shipments; USPS codes drive the plotly map
(locationmode "USA-states" only draws the 51 mainland/state regions).
"""

# State name -> USPS code (50 states + DC)
STATE_CODES = {
    "Alabama": "AL", "Alaska": "AK", "Arizona": "AZ", "Arkansas": "AR",
    "California": "CA", "Colorado": "CO", "Connecticut": "CT", "Delaware": "DE",
    "District of Columbia": "DC", "Florida": "FL", "Georgia": "GA", "Hawaii": "HI",
    "Idaho": "ID", "Illinois": "IL", "Indiana": "IN", "Iowa": "IA",
    "Kansas": "KS", "Kentucky": "KY", "Louisiana": "LA", "Maine": "ME",
    "Maryland": "MD", "Massachusetts": "MA", "Michigan": "MI", "Minnesota": "MN",
    "Mississippi": "MS", "Missouri": "MO", "Montana": "MT", "Nebraska": "NE",
    "Nevada": "NV", "New Hampshire": "NH", "New Jersey": "NJ", "New Mexico": "NM",
    "New York": "NY", "North Carolina": "NC", "North Dakota": "ND", "Ohio": "OH",
    "Oklahoma": "OK", "Oregon": "OR", "Pennsylvania": "PA", "Rhode Island": "RI",
    "South Carolina": "SC", "South Dakota": "SD", "Tennessee": "TN", "Texas": "TX",
    "Utah": "UT", "Vermont": "VT", "Virginia": "VA", "Washington": "WA",
    "West Virginia": "WV", "Wisconsin": "WI", "Wyoming": "WY",
}

US_STATES = sorted(STATE_CODES)

# Accepted on shipments, not drawn on the map
US_TERRITORIES = [
    "American Samoa", "Guam", "Northern Mariana Islands",
    "Puerto Rico", "U.S. Virgin Islands",
]

# Options offered by the shipment form
ALL_REGIONS = sorted(US_STATES + US_TERRITORIES)

CODE_TO_STATE = {code: name for name, code in STATE_CODES.items()}


def state_for_code(code: str):
    """USPS code -> state name, or None for unknown codes."""
    if not code:
        return None
    return CODE_TO_STATE.get(code.upper())
