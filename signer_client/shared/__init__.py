"""
Shared Components

Constants, models, codec, configuration, logging and exceptions used across
the signer client.
"""
