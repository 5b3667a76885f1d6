"""Core types shared by every tabchart component."""
