from .validator_service import Validator

__all__ = ['Validator']
