"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample drawables

SIMPLE_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <path android:fillColor="#FF000000" android:pathData="M12,2L2,22h20z"/>
</vector>'''

SIZED_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="48dp"
    android:height="32dp"
    android:viewportWidth="24"
    android:viewportHeight="16">
  <path android:pathData="M0,0h24v16H0z"/>
</vector>'''

IDS_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <path android:pathData="M0,0h1v1z"/>
  <group>
    <path android:pathData="M1,1h1v1z"/>
  </group>
  <path android:pathData="M2,2h1v1z"/>
  <group android:name="badge">
    <path android:pathData="M3,3h1v1z"/>
  </group>
</vector>'''

CLIPPED_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <group android:name="clipped">
    <clip-path android:pathData="M0,0h12v12H0z"/>
    <path android:fillColor="#FF0000" android:pathData="M0,0h24v24H0z"/>
    <path android:fillColor="#00FF00" android:pathData="M4,4h4v4H4z"/>
  </group>
</vector>'''

STROKED_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <path
      android:name="outline"
      android:pathData="M3,3L21,21"
      android:strokeColor="#FF212121"
      android:strokeWidth="2"
      android:strokeLineCap="round"
      android:strokeLineJoin="round"
      android:strokeMiterLimit="4"/>
</vector>'''


@pytest.fixture
def simple_vd() -> str:
    return SIMPLE_VD


@pytest.fixture
def sized_vd() -> str:
    return SIZED_VD


@pytest.fixture
def clipped_vd() -> str:
    return CLIPPED_VD
