"""Utility modules for Squiggles"""
