"""Terminal rendering of a dashboard session"""
