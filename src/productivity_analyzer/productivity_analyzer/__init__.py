"""Leave & Productivity Analyzer package.

Organized by feature modules (attendance, productivity, imports) around a pure
gap-filling engine, with a thin Flask controller layer and repository/service
layers for storage and reporting.
"""
