"""Servicios del Core: operación de conversión y view model de presentación."""
