"""Configuration, logging, the authorization gate and collaborator clients."""
