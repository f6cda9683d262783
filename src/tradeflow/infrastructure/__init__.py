"""Adapters for the external collaborators"""
