from geocountry.geoip import get_country

__all__ = ["get_country"]
