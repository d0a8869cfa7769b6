"""Use-case layer for task workflows.

Each module wraps one repository operation behind a callable object and
translates adapter failures into ``UseCaseError`` so view models never see
raw exceptions.
"""
