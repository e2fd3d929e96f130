"""
Pytest configuration and fixtures for better-ux-mcp tests.
"""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


SAMPLE_COMPONENT = """\
export function Toolbar({ onSave }) {
  return (
    <Box sx={{ display: 'flex', gap: 2 }}>
      <Button onClick={onSave}>Save</Button>
    </Box>
  );
}"""


@pytest.fixture
def sample_component():
    """A small React/MUI component used as pass-through input."""
    return SAMPLE_COMPONENT
