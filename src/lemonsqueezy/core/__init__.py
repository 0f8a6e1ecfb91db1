"""Núcleo sin I/O: configuración, errores, modelos y helpers de parámetros."""
