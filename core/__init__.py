"""Presentation clock core"""
