"""
Pipeline orchestration: context, exceptions and the build pipeline.
"""
