"""Shared helpers and exceptions"""
