"""
Abstract store interface for reading CI pipeline records.

This module defines the read-only contract that any build-orchestration
backend adapter must follow, allowing easy swapping between an HTTP API,
a direct cluster client, or an in-memory store for tests.
"""

from abc import ABC, abstractmethod

from .models import Build, Job, Project


class BuildStore(ABC):
    """
    Abstract base class for read-only access to projects, builds and jobs.

    Implementations give no ordering guarantees for the sequences they
    return. They report failures with StoreError (or NotFoundError for
    missing records) and never return partial results.
    """

    @abstractmethod
    def get_project(self, project_id: str) -> Project:
        """
        Retrieve a project by its ID.

        Args:
            project_id: ID of the project to retrieve

        Returns:
            Project object

        Raises:
            NotFoundError: If the project does not exist
            StoreError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def get_projects(self) -> list[Project]:
        """
        List all projects.

        Returns:
            List of Project objects in store order

        Raises:
            StoreError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def get_build(self, build_id: str) -> Build:
        """
        Retrieve a build by its ID.

        Args:
            build_id: ID of the build to retrieve

        Returns:
            Build object

        Raises:
            NotFoundError: If the build does not exist
            StoreError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def get_project_builds(self, project: Project) -> list[Build]:
        """
        List all builds of a project.

        Args:
            project: Project whose builds are listed

        Returns:
            List of Build objects in store order

        Raises:
            NotFoundError: If the project does not exist
            StoreError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def get_build_jobs(self, build: Build) -> list[Job]:
        """
        List all jobs of a build.

        Args:
            build: Build whose jobs are listed

        Returns:
            List of Job objects in store order

        Raises:
            NotFoundError: If the build does not exist
            StoreError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def get_job(self, job_id: str) -> Job:
        """
        Retrieve a job by its ID.

        Args:
            job_id: ID of the job to retrieve

        Returns:
            Job object

        Raises:
            NotFoundError: If the job does not exist
            StoreError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def get_job_log(self, job_id: str) -> bytes:
        """
        Fetch the complete log of a job.

        Args:
            job_id: ID of the job

        Returns:
            Raw log bytes

        Raises:
            NotFoundError: If the job does not exist
            StoreError: If the store cannot be reached
        """
        pass
