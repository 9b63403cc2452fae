"""Class Attendance package.

Feature modules (sections, students, attendance, reports) each carry a model,
a repository interface, a service and a thin Flask controller. The in-memory
store under ``database`` backs every repository.
"""
