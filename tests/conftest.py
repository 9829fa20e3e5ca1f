# Shared pytest fixtures for KubeDelta tests

import io
import os
import sys

import pytest
from rich.console import Console

# Ensure the 'src' directory is in the python path so we can import kubedelta
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from kubedelta.core.differ import DiffEngine


DEPLOYMENT_V1 = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: app
spec:
  replicas: 3
  template:
    spec:
      containers:
        - name: app
          image: app:1.0
          env:
            - name: MODE
              value: blue
---
apiVersion: v1
kind: Service
metadata:
  name: app
spec:
  ports:
    - port: 80
"""

DEPLOYMENT_V2 = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: app
spec:
  replicas: 5
  template:
    spec:
      containers:
        - name: app
          image: app:2.0
          env:
            - name: MODE
              value: blue
"""


@pytest.fixture
def engine():
    return DiffEngine()


@pytest.fixture
def manifests(tmp_path):
    # Writes the two sample manifests and returns their paths
    left = tmp_path / "file1.yaml"
    right = tmp_path / "file2.yaml"
    left.write_text(DEPLOYMENT_V1, encoding="utf-8")
    right.write_text(DEPLOYMENT_V2, encoding="utf-8")
    return left, right


@pytest.fixture
def console_buffer():
    # A rich Console that records plain text instead of writing to a terminal
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, no_color=True, highlight=False)
    return console, buffer
