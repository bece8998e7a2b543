"""Core configuration and wiring"""
