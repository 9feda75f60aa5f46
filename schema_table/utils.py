# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Utility functions."""

import inspect


def get_function_name() -> str:
    """Get the name of the calling function."""
    return inspect.currentframe().f_back.f_code.co_name  # type: ignore
