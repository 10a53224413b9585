"""Agenda and scheduling handle tests"""
