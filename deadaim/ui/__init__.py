"""
Terminal adapters: rendering and key input.
"""
