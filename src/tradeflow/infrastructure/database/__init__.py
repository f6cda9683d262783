"""SQLModel persistence"""
