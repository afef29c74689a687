"""
Pydantic model for a decoded armored message.

Built once at the end of a successful parse and never mutated afterwards.
"""

import json
from pathlib import Path
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """
    Structured message decoded from an armored envelope

    Attributes:
        type: Label of the opening section separator (e.g. "SIGNED CONTRACT")
        payload: Payload block lines joined with newlines
        signatures: One entry per signature section, in document order
    """
    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=1)
    payload: str
    signatures: Tuple[str, ...] = ()

    def __len__(self) -> int:
        """Return number of signatures"""
        return len(self.signatures)

    def save_to_json(
        self,
        output_path: Union[str, Path],
        overwrite: bool = False
    ) -> Path:
        """
        Save the message to a JSON file

        Args:
            output_path: Destination path (suffix is forced to .json)
            overwrite: Whether to overwrite an existing file

        Returns:
            Path to the saved file

        Raises:
            FileExistsError: If file exists and overwrite=False
        """
        output_path = Path(output_path)

        if output_path.suffix != '.json':
            output_path = output_path.with_suffix('.json')

        if output_path.exists() and not overwrite:
            raise FileExistsError(f"File exists: {output_path}. Set overwrite=True.")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.model_dump(mode='json'), f, indent=2, ensure_ascii=False)

        return output_path
