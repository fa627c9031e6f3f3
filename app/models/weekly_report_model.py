# app/models/weekly_report_model.py

import uuid

from sqlalchemy import Column, String, Date, DateTime, Boolean, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from config.database import Base


class WeeklyReport(Base):
    __tablename__ = "weekly_reports"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Informações básicas
    student_first_name = Column(String, nullable=False)
    student_last_name = Column(String, nullable=False)
    student_class = Column(String(8), nullable=False)
    observer_name = Column(String, nullable=False)
    week_start_date = Column(Date, nullable=False)
    week_end_date = Column(Date, nullable=False)

    # Competências (checklists armazenados como documento)
    autonomy_skills = Column(JSON, nullable=False)
    autonomy_comment = Column(Text, nullable=True)
    fine_motor_skills = Column(JSON, nullable=False)
    fine_motor_comment = Column(Text, nullable=True)
    communication_skills = Column(JSON, nullable=False)
    communication_comment = Column(Text, nullable=True)
    social_skills = Column(JSON, nullable=False)
    social_comment = Column(Text, nullable=True)

    # Acompanhamento diário (segunda a sexta)
    daily_tracking = Column(JSON, nullable=False)

    # Acompanhamento em casa
    home_objective_worked = Column(Boolean, nullable=False, default=False)
    home_status = Column(String(16), nullable=True)
    family_comment = Column(Text, nullable=True)

    # Observações finais
    final_observation = Column(Text, nullable=True)
    free_comments = Column(Text, nullable=True)

    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)

    owner = relationship("User", back_populates="weekly_reports")
