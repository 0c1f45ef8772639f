"""
City Name Resolver
==================

Turns free-text user input into a canonical city name and maps canonical
names to their state. Pure functions over static tables.

Author: India Travel Info Team
"""

from types import MappingProxyType


# Lower-cased misspellings, former and vernacular names -> canonical name
CITY_ALIASES = MappingProxyType({
    "banglore": "Bangalore",
    "bengaluru": "Bangalore",
    "bangaluru": "Bangalore",
    "bombay": "Mumbai",
    "mumbay": "Mumbai",
    "calcutta": "Kolkata",
    "kolkatta": "Kolkata",
    "madras": "Chennai",
    "tirupathi": "Tirupati",
    "hydarabad": "Hyderabad",
    "hyderbad": "Hyderabad",
    "puna": "Pune",
    "poona": "Pune",
    "ahmedabad": "Ahmedabad",
    "amdavad": "Ahmedabad",
    "new delhi": "New Delhi",
    "gurugram": "Gurgaon",
    "mysuru": "Mysore",
    "mangaluru": "Mangalore",
    "cochin": "Kochi",
    "trivandrum": "Thiruvananthapuram",
    "calicut": "Kozhikode",
    "vizag": "Visakhapatnam",
    "baroda": "Vadodara",
    "benares": "Varanasi",
    "banaras": "Varanasi",
    "orissa": "Odisha",
})

# Canonical city -> state or union territory
CITY_STATES = MappingProxyType({
    "Mumbai": "Maharashtra", "Pune": "Maharashtra", "Nagpur": "Maharashtra", "Nashik": "Maharashtra",
    "Delhi": "Delhi", "New Delhi": "Delhi", "Gurgaon": "Haryana", "Noida": "Uttar Pradesh",
    "Bangalore": "Karnataka", "Mysore": "Karnataka", "Hubli": "Karnataka", "Mangalore": "Karnataka",
    "Chennai": "Tamil Nadu", "Coimbatore": "Tamil Nadu", "Madurai": "Tamil Nadu", "Salem": "Tamil Nadu",
    "Tirupati": "Andhra Pradesh", "Nellore": "Andhra Pradesh", "Vijayawada": "Andhra Pradesh",
    "Visakhapatnam": "Andhra Pradesh",
    "Hyderabad": "Telangana", "Warangal": "Telangana", "Nizamabad": "Telangana", "Karimnagar": "Telangana",
    "Kolkata": "West Bengal", "Darjeeling": "West Bengal", "Siliguri": "West Bengal", "Durgapur": "West Bengal",
    "Ahmedabad": "Gujarat", "Surat": "Gujarat", "Vadodara": "Gujarat", "Rajkot": "Gujarat",
    "Jaipur": "Rajasthan", "Udaipur": "Rajasthan", "Jodhpur": "Rajasthan", "Ajmer": "Rajasthan",
    "Kochi": "Kerala", "Thiruvananthapuram": "Kerala", "Kozhikode": "Kerala", "Thrissur": "Kerala",
    "Bhubaneswar": "Odisha", "Cuttack": "Odisha", "Rourkela": "Odisha", "Berhampur": "Odisha",
    "Lucknow": "Uttar Pradesh", "Varanasi": "Uttar Pradesh", "Agra": "Uttar Pradesh",
})

DEFAULT_STATE = "India"


def normalize(raw: str) -> str:
    """
    Resolve raw user input to a canonical city name

    Known aliases resolve exactly. Anything else is returned trimmed with
    only its first letter upper-cased, which may not match any table.

    Args:
        raw (str): City name as typed by the user

    Returns:
        str: Canonical (or best-effort) city name

    Raises:
        ValueError: If the input is empty or whitespace

    Examples:
        >>> normalize("  BOMBAY ")
        'Mumbai'
        >>> normalize("nellore")
        'Nellore'
    """
    if raw is None or not str(raw).strip():
        raise ValueError("City name is required")

    trimmed = " ".join(str(raw).split())
    alias = CITY_ALIASES.get(trimmed.lower())
    if alias:
        return alias

    return trimmed[0].upper() + trimmed[1:].lower()


def state_for(canonical_name: str) -> str:
    """State for a canonical city name, "India" when unknown"""
    return CITY_STATES.get(canonical_name, DEFAULT_STATE)
