from unittest.mock import MagicMock

import pytest
import requests
from github import GithubException

from ginit.errors import RepoCreationError
from ginit.models import AccessToken, RepositoryDefaults, RepositoryRequest
from ginit.repos import RepositoryProvisioner


def _client(ssh_url="git@github.com:alice/myrepo.git", error=None):
    client = MagicMock()
    user = client.get_user.return_value
    if error is not None:
        user.create_repo.side_effect = error
    else:
        user.create_repo.return_value.ssh_url = ssh_url
    return client


def _provisioner(prompter, client, directory):
    factory = MagicMock(return_value=client)
    return RepositoryProvisioner(AccessToken("tok"), prompter, client_factory=factory, directory=directory), factory


def test_defaults_from_arguments(prompter_factory, tmp_path):
    prompter = prompter_factory([None, None, None])
    prov, _ = _provisioner(prompter, _client(), tmp_path)

    request = prov.ask(RepositoryDefaults("myrepo", "a test repo"))
    assert request == RepositoryRequest(name="myrepo", description="a test repo", private=False)


def test_name_defaults_to_directory(prompter_factory, tmp_path):
    project = tmp_path / "project-x"
    project.mkdir()
    prov, _ = _provisioner(prompter_factory([None, None, None]), _client(), project)

    request = prov.ask(RepositoryDefaults())
    assert request == RepositoryRequest(name="project-x", description=None, private=False)


def test_empty_name_is_reprompted(prompter_factory, tmp_path):
    prompter = prompter_factory(["  ", "named", "", "private"])
    prov, _ = _provisioner(prompter, _client(), tmp_path)

    request = prov.ask(RepositoryDefaults())
    assert request == RepositoryRequest(name="named", description=None, private=True)
    assert len(prompter.asked) == 4


def test_provision_creates_repo_and_returns_ssh_url(prompter_factory, tmp_path):
    client = _client()
    prov, factory = _provisioner(prompter_factory([None, None, None]), client, tmp_path)

    result = prov.provision(RepositoryDefaults("myrepo", "a test repo"))

    assert result.push_endpoint == "git@github.com:alice/myrepo.git"
    factory.assert_called_once_with(AccessToken("tok"))
    client.get_user.return_value.create_repo.assert_called_once_with(
        "myrepo", private=False, description="a test repo"
    )


def test_create_omits_missing_description(tmp_path, prompter_factory):
    client = _client()
    prov, _ = _provisioner(prompter_factory(), client, tmp_path)
    prov.create(RepositoryRequest("bare", None, True))
    client.get_user.return_value.create_repo.assert_called_once_with("bare", private=True)


def test_create_maps_github_errors(tmp_path, prompter_factory):
    error = GithubException(422, {"message": "Repository creation failed."}, None)
    prov, _ = _provisioner(prompter_factory(), _client(error=error), tmp_path)

    with pytest.raises(RepoCreationError) as info:
        prov.create(RepositoryRequest("dup"))
    assert info.value.status == 422
    assert info.value.message == "Repository creation failed."


def test_create_maps_transport_errors(tmp_path, prompter_factory):
    prov, _ = _provisioner(prompter_factory(), _client(error=requests.ConnectionError("down")), tmp_path)
    with pytest.raises(RepoCreationError) as info:
        prov.create(RepositoryRequest("x"))
    assert info.value.status is None
