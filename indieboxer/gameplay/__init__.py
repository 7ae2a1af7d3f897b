"""
Gameplay logic for Indieboxer.
NO UI DEPENDENCIES.
"""
