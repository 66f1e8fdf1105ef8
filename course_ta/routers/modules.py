"""
Modules Router

Lists the course modules a student can pick. Each module id is also the
vector index namespace holding that module's material.
"""

from fastapi import APIRouter
from pydantic import BaseModel


router = APIRouter()

# First entry is the default selection
COURSE_MODULES: dict[str, str] = {
    "syllabus": "Course Syllabus",
    "module-1": "Module 1: Security & Crypto Concepts + Info/Data Privacy Concepts",
    "module-2": "Module 2: Privacy Requirements & Threats",
    "module-3": "Module 3: Technical Security Controls for Privacy",
    "module-4": "Module 4: Privacy Enhancing Technologies",
    "module-5": "Module 5: Info/Data Privacy Management",
    "module-6": "Module 6: Privacy Education, Protection & Incident Handling",
    "module-7": "Module 7: Legal & Regulatory Privacy Requirements",
}


class ModuleInfo(BaseModel):
    id: str
    label: str


@router.get("", response_model=list[ModuleInfo])
async def get_course_modules():
    return [ModuleInfo(id=module_id, label=label) for module_id, label in COURSE_MODULES.items()]
