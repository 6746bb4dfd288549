# rental_agency/utils/constants.py

"""
Global constants for vehicle states, allowed types, and pricing rules.
These constants are imported by both models and services.
"""


class VehicleStatus:
    AVAILABLE = "available"
    RENTED = "rented"


# --- Pricing (per rental day) ---
GPS_DAILY_SURCHARGE = 10
NO_CARRIER_DAILY_DISCOUNT = 5
LOAD_DAILY_FACTOR = 2

# --- Misc ---
ALLOWED_TYPES = {"car", "motorcycle", "truck"}

# --- Rental outcome messages ---
MSG_NOT_AVAILABLE = "Vehicle not available"
MSG_NOT_RENTED = "Vehicle is not currently rented"
