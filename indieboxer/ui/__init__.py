"""
Thin pygame adapters around the gameplay package.
"""
