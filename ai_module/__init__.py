"""AI-assisted slide planning"""
