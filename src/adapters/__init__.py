"""Adaptadores: HTTP (httpx), codec SOAP y gateway asíncrono."""
