"""Contratos (Protocol) del Core.

El pipeline depende de `ServiceClient` y `Prompter`; los adaptadores HTTP y
de terminal los implementan, y los tests los sustituyen por fakes.
"""
