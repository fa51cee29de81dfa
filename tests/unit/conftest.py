"""Unit test configuration.

Unit tests should be fast and isolated - no database, no network, no
running application lifespan.
"""

import pytest


# Mark all tests in this directory as unit tests
pytestmark = pytest.mark.unit
