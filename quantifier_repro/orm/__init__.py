"""
This orm module contains the ORM (Object-Relational Mapping) models of the Classroom → PuzzleGroup → Puzzle
hierarchy, the schema bootstrap, repositories, the Unit of Work, and database connection utilities.
"""
