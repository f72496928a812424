def build_resume_prompt(content: str) -> str:
    return (
        "Analyze this resume and provide a comprehensive analysis with:\n"
        "1. A brief summary of the candidate's profile\n"
        "2. Extract all technical and soft skills mentioned\n"
        "3. Suggest 5 specific improvements to make the resume more attractive to employers\n"
        "4. Estimate years of experience based on the content\n\n"
        f"Resume content:\n{content}\n\n"
        "Please respond in JSON format with the following structure:\n"
        "{\n"
        '  "summary": "Brief professional summary",\n'
        '  "skills": ["skill1", "skill2", ...],\n'
        '  "suggestions": ["improvement1", "improvement2", ...],\n'
        '  "experienceYears": number,\n'
        '  "keyStrengths": ["strength1", "strength2", ...]\n'
        "}"
    )


def build_career_path_prompt(current_role: str, target_role: str, timeline_months: int) -> str:
    return (
        f'Create a detailed career transition plan from "{current_role}" to "{target_role}" '
        f"within {timeline_months} months.\n\n"
        "Provide a comprehensive roadmap including:\n"
        "1. Overview of the transition strategy\n"
        "2. Key skills to develop\n"
        "3. Specific milestones with timeframes\n"
        "4. Learning resources and recommendations\n"
        "5. Potential challenges and how to overcome them\n\n"
        "Please respond in JSON format with this structure:\n"
        "{\n"
        '  "overview": "Strategic overview of the career transition",\n'
        '  "skills": ["skill1", "skill2", "skill3"],\n'
        '  "milestones": [\n'
        "    {\n"
        '      "title": "Milestone title",\n'
        '      "description": "What to achieve",\n'
        '      "timeframe": "Month 1-2"\n'
        "    }\n"
        "  ],\n"
        '  "resources": "Recommended learning resources and platforms",\n'
        '  "challenges": ["challenge1", "challenge2"],\n'
        '  "successTips": ["tip1", "tip2"]\n'
        "}"
    )


def build_job_search_prompt(query: str) -> str:
    return (
        f'Generate 5 realistic job listings for the search query: "{query}"\n\n'
        "For each job, provide:\n"
        "1. Job title\n"
        "2. Company name (make it realistic but fictional)\n"
        "3. Location\n"
        "4. Salary range\n"
        "5. Job description (2-3 sentences)\n"
        "6. Match score (percentage based on how well it matches the query)\n"
        "7. Match reasons (why this job fits the search)\n\n"
        "Please respond in JSON format with this structure:\n"
        "{\n"
        '  "jobs": [\n'
        "    {\n"
        '      "title": "Job Title",\n'
        '      "company": "Company Name",\n'
        '      "location": "City, State/Country",\n'
        '      "salary": "$X,XXX - $X,XXX",\n'
        '      "description": "Job description here...",\n'
        '      "matchScore": 85,\n'
        '      "matchReasons": ["reason1", "reason2", "reason3"],\n'
        '      "url": "https://example.com/job-link"\n'
        "    }\n"
        "  ]\n"
        "}\n\n"
        "Make the jobs diverse in terms of experience levels and company sizes."
    )
