from .config import settings
from .repository import WordRepository
from .vocabulary import VocabularyLoader

repository = WordRepository()
vocab_loader = VocabularyLoader(f"{settings.VOCAB_DIR}", repository)
