__version__ = "1.0.0"
APP_NAME = "amdis-msl"
APP_DESCRIPTION = "Parser for AMDIS Mass Spectral Library (MSL) documents"
