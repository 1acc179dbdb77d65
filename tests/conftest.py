"""
Configuration for pytest tests.
"""

import os
import shutil
import pytest
from pathlib import Path

from transcript_digest.config import config
from transcript_digest.models.schemas import VideoMetadata, VideoTranscript


LONG_SENTENCES = [
    "Machine learning models need large amounts of training data to perform well.",
    "Training data must be cleaned before any model can learn useful patterns.",
    "Today we will talk about how data pipelines feed machine learning systems.",
    "Data pipelines collect raw records from many different sources every day.",
    "Some sources produce messy records with missing values and broken fields.",
    "Cleaning those records takes most of the time in a typical project.",
    "Feature engineering turns cleaned records into signals a model can use.",
    "Good features often matter more than the choice of model architecture.",
    "Evaluation tells us whether the model generalizes to unseen examples.",
    "Cross validation splits the training data into several folds for evaluation.",
    "Overfitting happens when a model memorizes training data instead of learning.",
    "Regularization and early stopping are common defenses against overfitting.",
    "Deployment moves a trained model into a production environment.",
    "Monitoring production predictions helps catch drift in incoming data.",
    "Drift means the incoming data no longer resembles the training data.",
    "When drift appears the team should retrain the model with fresh data.",
    "Documentation keeps the whole pipeline understandable for new engineers.",
    "Version control for data and models makes experiments reproducible.",
    "Reproducible experiments let other engineers verify published results.",
    "Cooking pasta requires boiling water seasoned generously with salt.",
    "Gardening tomatoes needs sunshine, patience, and regular watering.",
    "Finally, remember that machine learning is mostly careful data work.",
    "Thanks for watching and see you in the next video about pipelines.",
]


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables and directories."""
    test_data_dir = Path("test_data")
    test_summaries_dir = test_data_dir / "summaries"
    test_summaries_dir.mkdir(parents=True, exist_ok=True)

    original_summaries_dir = config.SUMMARIES_DIR
    config.SUMMARIES_DIR = test_summaries_dir
    os.environ["ENVIRONMENT"] = "development"

    yield

    config.SUMMARIES_DIR = original_summaries_dir
    shutil.rmtree(test_data_dir, ignore_errors=True)


@pytest.fixture(scope="session")
def video_url():
    """Return a test video URL."""
    return "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def metadata():
    """Fixture to create a VideoMetadata object."""
    return VideoMetadata(
        title="Test Video",
        duration=754,
        channel_name="Test Channel",
    )


@pytest.fixture
def long_sentences():
    """Distinct sentences making up the long transcript."""
    return list(LONG_SENTENCES)


@pytest.fixture
def long_transcript():
    """Fixture for a transcript well above the scoring threshold."""
    return VideoTranscript(text=" ".join(LONG_SENTENCES))


@pytest.fixture
def short_transcript():
    """Fixture for a two-sentence, 40-word transcript."""
    sentence = " ".join(f"word{i}" for i in range(19)) + " done."
    return VideoTranscript(text=f"{sentence} {sentence}")


@pytest.fixture
def fox_transcript():
    """The same sentence repeated 150 times."""
    return VideoTranscript(text=" ".join(["The quick brown fox jumps over the lazy dog."] * 150))
