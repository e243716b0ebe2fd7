from pathlib import Path

import pytest

from mtgen.config.loader import GeneratorSettings

NS = {"sf": "http://soap.sforce.com/2006/04/metadata"}

CSV_HEADER = "DeveloperName,Label,Custom_Permissions__c,Run_Or_Bypass__c,Object__c,Active__c\n"


@pytest.fixture
def settings() -> GeneratorSettings:
    return GeneratorSettings()


@pytest.fixture
def rows():
    return [
        {
            "DeveloperName": "AccountBeforeInsert",
            "Label": "Account Before Insert",
            "Custom_Permissions__c": "",
            "Run_Or_Bypass__c": "Run",
            "Object__c": "Account",
            "Active__c": "true",
        },
        {
            "DeveloperName": "ContactAfterUpdate",
            "Label": "Contact After Update",
            "Custom_Permissions__c": "Something_Else",
            "Run_Or_Bypass__c": "",
            "Object__c": "Contact",
            "Active__c": "false",
        },
    ]


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "microtriggers.csv"
    path.write_text(
        CSV_HEADER
        + "AccountBeforeInsert,Account Before Insert,,Run,Account,true\n"
        + "ContactAfterUpdate,Contact After Update,Something_Else,,Contact,false\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def ns():
    return NS


@pytest.fixture
def csv_header() -> str:
    return CSV_HEADER
