"""Flask blueprints"""
