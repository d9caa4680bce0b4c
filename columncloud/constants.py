"""Physical constants used throughout the column model (SI units)."""

import math

PI = math.pi
RHO_AIR = 1.0  # [kg m-3] density of air mixture (approximation)
RHO_H2O = 1000.0  # [kg m-3] density of water at 288 K and 100000 Pa
ES0 = 611.2  # [Pa] saturation pressure over a flat surface at 273.15 K
T0 = 273.15  # [K] freezing temperature of water
H_LAT = 2.257e6  # [J kg-1] heat of vaporization
R_V = 461.401  # [J kg-1 K-1] specific gas constant of water vapour
R_G = 287.102  # [J kg-1 K-1] specific gas constant of air
R = 8.314  # [J K-1 mol-1] ideal gas constant
K = 2.43e-2  # [W m-1 K-1] thermal conductivity of air
D = 2.82e-5  # [m2 s-1] diffusion constant of water vapour in air
C_P = 1003.5  # [J kg-1 K-1] specific heat at constant pressure
GAMMA = 72.7e-3  # [N m-1] surface tension of water at 293 K
M_MOL_AIR = 28.9e-3  # [kg mol-1] molecular mass of air
M_MOL_O3 = 48.0e-3  # [kg mol-1] molecular mass of ozone
M_MOL_O2 = 32.0e-3  # [kg mol-1] molecular mass of oxygen
M_MOL_CO2 = 44.0e-3  # [kg mol-1] molecular mass of carbon dioxide
M_MOL_NO2 = 46.0e-3  # [kg mol-1] molecular mass of NO2
M_MOL_CH4 = 16.0e-3  # [kg mol-1] molecular mass of methane
RHO_O3 = 100000.0 * M_MOL_O3 / R / T0  # [kg m-3] density of O3 ideal gas
RHO_O2 = 100000.0 * M_MOL_O2 / R / T0  # [kg m-3] density of O2 ideal gas
RHO_CO2 = 100000.0 * M_MOL_CO2 / R / T0  # [kg m-3] density of CO2 ideal gas
RHO_NO2 = 100000.0 * M_MOL_NO2 / R / T0  # [kg m-3] density of NO2 ideal gas
RHO_CH4 = 100000.0 * M_MOL_CH4 / R / T0  # [kg m-3] density of CH4 ideal gas
M_MOL_H2O = 18.0e-3  # [kg mol-1] molecular mass of water
M_MOL_S = 58.4e-3  # [kg mol-1] molecular mass of NaCl
RHO_S = 2.16e3  # [kg m-3] density of NaCl at 298 K
ETA_AIR = 17.1e-6  # [Pa s] dynamic viscosity of air at 273 K
G = 9.81  # [m s-2] gravitational acceleration
LAPSE_RATE_A = G / C_P  # [K m-1] adiabatic lapse rate