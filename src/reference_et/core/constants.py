"""
Application-wide constants for reference evapotranspiration estimation.

This module defines default values and physical constants used by the
FAO Penman-Monteith and Priestley-Taylor models.
"""

# Missing data
# Per-station observations equal to this value are treated as missing
NOVALUE = -9999.0

# Timestamp format of the current timestep (UTC, minute precision)
DEFAULT_TIMESTAMP_FORMAT = "%Y%m%d%H%M"

# Daylight window (hours, exclusive on both ends)
DAYLIGHT_START_HOUR = 6
DAYLIGHT_END_HOUR = 18

# Vapor Pressure Constants (Tetens formula)
TETENS_A = 0.6108  # kPa
TETENS_B = 17.27
TETENS_C = 237.3  # °C
SLOPE_COEF = 4098

# FAO Penman-Monteith Constants
FAO_PSYCHROMETRIC_COEF = 0.665e-3  # kPa/°C per kPa
FAO_RADIATION_COEF = 0.408  # mm per MJ m⁻²
FAO_DAILY_AERODYNAMIC_COEF = 900.0
FAO_HOURLY_AERODYNAMIC_COEF = 37.0
FAO_WIND_COEF = 0.34
KELVIN_OFFSET = 273.0

# Hourly soil heat flux coefficient (daytime value, applied to every hour)
FAO_HOURLY_SOIL_HEAT_COEF = 0.1

# Priestley-Taylor Constants
LATENT_HEAT_A = 2.501  # MJ/kg
LATENT_HEAT_B = 0.002361  # MJ/kg per °C
SPECIFIC_HEAT_AIR = 0.001013  # MJ kg⁻¹ °C⁻¹
MOLECULAR_WEIGHT_RATIO = 0.622

# Unit Conversions
FAO_PRESSURE_DIVISOR = 10.0  # hPa -> kPa
PT_RADIATION_FACTOR = 0.0864  # W m⁻² -> MJ m⁻² day⁻¹
HOURS_PER_DAY = 24.0

# FAO daily defaults (already in post-conversion units)
FAO_DAILY_DEFAULT_NET_RADIATION = 2.0  # MJ m⁻² day⁻¹
FAO_DAILY_DEFAULT_WIND = 2.0  # m/s
FAO_DAILY_DEFAULT_MAX_TEMP = 15.0  # °C
FAO_DAILY_DEFAULT_MIN_TEMP = 0.0  # °C
FAO_DAILY_DEFAULT_RH = 70.0  # %
FAO_DAILY_DEFAULT_PRESSURE = 100.0  # kPa

# FAO hourly defaults (already in post-conversion units)
FAO_HOURLY_DEFAULT_NET_RADIATION = 2.0  # MJ m⁻² hour⁻¹
FAO_HOURLY_DEFAULT_WIND = 2.0  # m/s
FAO_HOURLY_DEFAULT_TEMP = 15.0  # °C
FAO_HOURLY_DEFAULT_RH = 70.0  # %
FAO_HOURLY_DEFAULT_PRESSURE = 100.0  # kPa

# Priestley-Taylor defaults (net radiation in raw W m⁻², converted like observations)
PT_DEFAULT_DAILY_NET_RADIATION = 300.0  # W m⁻²
PT_DEFAULT_HOURLY_NET_RADIATION = 100.0  # W m⁻²
PT_DEFAULT_TEMP = 15.0  # °C
PT_DEFAULT_PRESSURE = 100.0  # kPa
PT_DEFAULT_ALPHA = 1.26
PT_DEFAULT_MORNING_COEFFICIENT = 0.0
PT_DEFAULT_NIGHT_COEFFICIENT = 0.0

# Plausibility ranges used by the input validator
MIN_PLAUSIBLE_PRESSURE = 50.0  # kPa
MAX_PLAUSIBLE_PRESSURE = 120.0  # kPa
