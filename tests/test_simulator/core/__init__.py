"""Elevator, passenger and container tests"""
