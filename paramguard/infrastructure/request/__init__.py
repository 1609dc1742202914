from .request_sources import FlaskRequestSource, MappingRequestSource, as_request_source

__all__ = [
    'FlaskRequestSource',
    'MappingRequestSource',
    'as_request_source'
]
