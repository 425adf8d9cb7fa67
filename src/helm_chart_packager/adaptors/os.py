# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os
import shutil


def list_dir(path: str) -> list[str]:
    return os.listdir(path)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def is_file(path: str) -> bool:
    return os.path.isfile(path)


def create_dirs(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def remove_directory(path: str) -> None:
    shutil.rmtree(path)


def copy_tree(source: str, destination: str) -> None:
    shutil.copytree(source, destination, dirs_exist_ok=True)


def copy_file(source: str, destination: str) -> None:
    shutil.copyfile(source, destination)


def open_file(file_path: str) -> str:
    with open(file_path, "r", encoding="utf-8") as file:
        return file.read()


def write_file(file_path: str, content: str) -> None:
    with open(file_path, "w", encoding="utf-8") as file:
        file.write(content)


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)


def parent_directory(path: str) -> str:
    return os.path.dirname(path)
