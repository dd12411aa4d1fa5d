"""Modelos del dominio NovaEnv (Pydantic v2): credenciales, usuario,
proyectos y entornos. Sin dependencias de HTTP ni de la CLI.
"""
