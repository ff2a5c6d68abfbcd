"""WOL Service — Wake-on-LAN over HTTP."""

__version__ = "1.0.0"
