"""Modelos del dominio.

Aquí viven las estructuras de datos (Pydantic v2): envelope, request y JSON:API.
El dominio no conoce httpx.
"""
