"""Endpoints de clientes."""
