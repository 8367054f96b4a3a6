"""
Application Layer

Ports to the voice transport and the services that drive them.
"""
