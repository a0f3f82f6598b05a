"""Streamlit presenter UI"""
