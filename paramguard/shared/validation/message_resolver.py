"""
Message resolution for failed validations.

This module turns the failing rule identifiers of a field into the
field's final error list by consulting message layers in precedence
order: rule defaults, validator defaults, call messages, then
per-field messages.
"""

from typing import Dict, List, Mapping, Sequence

from ...core.entities.validation_entity import MessageMergeMode
from ..exceptions.validation_errors import AggregateValidationFailure


class MessageResolver:
    """Resolves and merges message layers for a failed field."""

    def __init__(self, mode: MessageMergeMode = MessageMergeMode.CONCATENATE):
        """
        Initialize message resolver.

        Args:
            mode: How resolved layers are merged
        """
        self.mode = mode

    @staticmethod
    def resolve(
        failing_identifiers: Sequence[str],
        layer: Mapping[str, str]
    ) -> List[str]:
        """
        Select the templates of a layer that apply to failing rules.

        Args:
            failing_identifiers: Identifiers of the violated rules
            layer: Identifier to template mapping

        Returns:
            List[str]: Templates in the layer's key order, one per
            failing identifier the layer knows about
        """
        failing = set(failing_identifiers)
        return [
            template
            for identifier, template in layer.items()
            if identifier in failing
        ]

    def compose(
        self,
        failure: AggregateValidationFailure,
        layers: Sequence[Mapping[str, str]]
    ) -> List[str]:
        """
        Build the error list of a field from its message layers.

        Args:
            failure: The field's aggregate failure
            layers: Message layers, lowest precedence first

        Returns:
            List[str]: Rendered messages with empty entries dropped
        """
        if self.mode is MessageMergeMode.OVERRIDE:
            merged: Dict[str, str] = {}
            for layer in layers:
                for identifier, message in failure.resolve_items(layer):
                    merged[identifier] = message
            return [message for message in merged.values() if message]

        messages: List[str] = []
        for layer in layers:
            messages.extend(failure.resolve(layer))
        return [message for message in messages if message]
