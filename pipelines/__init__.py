"""
Data pipelines for the commute traffic collector

This directory contains pipelines that run on schedules:
- collect_traffic.py: Fetch and store commute routes (every 30 minutes)
"""
